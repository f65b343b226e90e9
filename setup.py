from setuptools import setup, find_packages

setup(
    name="oligoprop",
    version="1.0.0",
    description="Physicochemical properties of DNA oligonucleotides",
    long_description="GC content, molecular weight, melting temperature, nearest-neighbor thermodynamics, hairpins and self-dimers for short DNA oligos, with support for ambiguous N bases",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
    'biopython>=1.83',
    'numpy>=1.24.4',
    'pandas>=2.0.3',
    'click>=8.0',
    'pyyaml>=6.0',
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "oligoprop=oligoprop.cli.main:cli",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    )
