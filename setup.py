from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("faissio/.version", "r", encoding="utf-8") as fh:
    version = fh.read().strip()

setup(
    name="faissio",
    version=version,
    author="Ran Aroussi",
    description="Persistence for FAISS indices: files, memory-mapped reads and in-memory buffers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["faissio", "faissio.*"]),
    package_data={"faissio": [".version"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.9",
    install_requires=[
        "faiss-cpu>=1.7.2",  # or faiss-gpu for GPU support
        "numpy>=1.19.5",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "black>=21.5b2",
            "isort>=5.9.1",
            "mypy>=0.812",
        ],
    },
    entry_points={
        'console_scripts': [
            'faissio=faissio.cli:main',
        ],
    },
)
