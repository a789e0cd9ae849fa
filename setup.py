from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="PyPolyInterp",
    version="0.0.1",
    description="Lagrange and Newton interpolation of 4 cos(2x) on equally spaced nodes with a Lagrange remainder error estimate.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["scipy_polyinterp", "scipy_polyinterp.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=["numpy", "scipy", "matplotlib"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["polyinterp=scipy_polyinterp.__main__:main"]},
)
