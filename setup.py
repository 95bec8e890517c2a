from setuptools import setup, find_packages

setup(
    name="evm_signature",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "eth-utils>=2.3.0",
        "eth-hash[pycryptodome]>=0.5.2",
        "loguru>=0.7.2",
        "click>=8.1.7",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0",
            "black>=23.10.1",
            "isort>=5.12.0",
            "flake8>=6.1.0",
            "mypy>=1.6.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "evm-signature=evm_signature.cli:cli",
        ],
    },
    python_requires=">=3.9",
    description="Value types and helpers for EVM hex strings, addresses, private keys and wei/ether amounts",
    keywords="ethereum, evm, address, hex, wei",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
