"""setup.py file."""
from setuptools import setup, find_packages

with open("requirements.txt", "r") as fs:
    reqs = [r for r in fs.read().splitlines() if (len(r) > 0 and not r.startswith("#"))]

with open("README.md", "r") as fs:
    long_description = fs.read()


setup(
    name="cisco-nxapi",
    version="0.1.0",
    packages=find_packages(exclude=("test*",)),
    description="Cisco NX-OS NX-API client and response decoders",
    license="Apache 2.0",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Topic :: Utilities",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
    ],
    python_requires=">=3.8",
    include_package_data=True,
    install_requires=reqs,
    extras_require={"test": ["pytest", "pyyaml"]},
    entry_points={
        "console_scripts": [
            "cisco-nxapi=cisco_nxapi.clitools.cl_nxapi:main",
        ]
    },
)
