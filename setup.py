# setup.py
from setuptools import setup, find_packages

setup(
    name="scop",
    version="1.0.0",
    description="Wavefront OBJ loader and indexed mesh builder for an OpenGL viewer",
    packages=find_packages(include=["scop", "scop.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "PyOpenGL>=3.1.5",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["scop=scop.cli:main"],
    },
)
