""" fincurve build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import fincurve

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=fincurve.name,
    version=fincurve.__version__,
    license=fincurve.__license__,
    author=fincurve.__author__,
    author_email=fincurve.__author_email__,
    description="Point arithmetic on short Weierstrass elliptic curves over finite fields",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords="elliptic-curves finite-fields weierstrass point-arithmetic",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
