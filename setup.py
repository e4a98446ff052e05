#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="wibar",
    version="0.1.0",
    description="Screen-edge docked bars with stacking margins for Python window managers",
    author="pinpox",
    license="ISC",
    packages=find_packages(include=["wibar", "wibar.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pypubsub>=4.0",
    ],
    extras_require={
        "cairo": ["pycairo>=1.20"],
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
