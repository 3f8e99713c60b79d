from setuptools import setup, find_packages

setup(
    name="rootfinder",
    version="0.1.0",
    description="Scalar root finding with interchangeable strategies and convergence logging",
    author="adamfilli",
    packages=find_packages(include=["rootfinder", "rootfinder.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.10",
)
