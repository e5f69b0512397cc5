from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setup(
    name="py-nft-metadata",
    packages=["py_nft_metadata"],
    package_dir={"": "src"},
    version="1.0.0",
    description="Schema, JSON (de)serialization and JSON Schema export for NFT metadata documents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    install_requires=["pydantic>=2.5", "loguru"],
    extras_require={"test": ["pytest"]},
)
