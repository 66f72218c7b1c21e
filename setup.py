"""
Setup script for the pychained package.

Install with: pip install .
Develop with: pip install -e .[test]
Create wheel: python setup.py bdist_wheel
"""

from setuptools import setup, find_packages

long_description = """
pychained - Separate-Chaining Hash Table with Multi-Valued Keys
================================================================

A pure Python hash table that resolves collisions by chaining and keeps
every value a key was inserted with, in arrival order, instead of
overwriting.

Features:
- Fixed capacity with explicit, order-preserving resize/rehash
- Insert appends to a per-key FIFO of values
- Correct chain relinking on removal
- Key enumeration and load-factor reporting
- Dual API: explicit methods and Pythonic protocols

Example:
    from pychained import ChainedHashTable

    t = ChainedHashTable(4)
    t.insert('a', 1)
    t.insert('a', 3)
    list(t.search('a'))  # [1, 3]
    t.resize(16)
"""

setup(
    name="pychained",
    version="1.0.0",
    description="Separate-chaining hash table mapping keys to FIFO value sequences",
    long_description=long_description,
    long_description_content_type="text/plain",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
        "bench": ["pyrsistent>=0.19"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    zip_safe=False,
)
