from setuptools import find_packages, setup

setup(
    name="huffv",
    version="0.1.0",
    description="Generate Huff Groth16 verifier contracts from snarkjs verification keys",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"huffv": ["contracts/*.huff"]},
    entry_points={"console_scripts": ["huffv = huffv.cli:main"]},
    extras_require={"test": ["pytest", "py_ecc"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
