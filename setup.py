# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="wordtracker",
    version="0.1.0",
    description="Track the files and line numbers every word appears on, with persistent index and reports",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["wordtracker*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wordtracker=wordtracker.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
