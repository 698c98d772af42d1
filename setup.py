import setuptools

with open("README.md") as f:
    long_description = f.read()

setuptools.setup(
    name = "thinbus-srp",
    version = "0.1",
    author = "Arthus Leroy",
    author_email = "arthus.leroy@epita.fr",
    description= "SRP-6a password authentication, interoperable with the thinbus Javascript and Java implementations",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    packages = setuptools.find_packages(exclude = [ "tests", "tools" ]),
    include_package_data = True,
    license = "MIT license",
    classifiers = [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
    ],
    python_requires = '>=3.8',
    keywords = [ "python", "SRP", "SRP-6a", "thinbus", "authentication" ],
    install_requires = [
        "aiohttp",
        "jsonschema",
        "multidict",
        "pycryptodome",
    ],
    extras_require = {
        "test": [ "pytest" ],
    }
)
