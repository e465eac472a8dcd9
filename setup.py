"""Setup the pypi package."""

import setuptools  # type: ignore[import]

with open("README.md", "r", encoding="utf-8") as f:
    readme = f.read()

setuptools.setup(
    name="pygaggiuino",
    version="0.1.0",
    description="An async Python client for the local API of Gaggiuino espresso machines",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    python_requires=">=3.11",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9.0",
        "mashumaro>=3.13",
        "yarl>=1.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
            "aioresponses>=0.7.6",
            # aioresponses 0.7.9 is not compatible with aiohttp 3.14
            "aiohttp<3.14",
        ],
    },
    package_data={
        "pygaggiuino": ["py.typed"],
    },
)
