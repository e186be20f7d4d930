from setuptools import setup, find_packages

setup(
    name="climate-hazard-trends",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.3.0",
        "scipy>=1.7.0",
        "matplotlib>=3.4.0",
        "seaborn>=0.11.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    description="Percentile-based climate hazard event detection and yearly trend analysis",
    python_requires=">=3.8",
)
