# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="huffcode",
    version="1.0.0",
    description="Huffman tree construction, tree serialization and text encoding/decoding",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["huffcode", "huffcode.*"]),
    python_requires=">=3.9",
    install_requires=[
        "bitarray>=2.3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'huffcode=huffcode.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
