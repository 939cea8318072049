from setuptools import find_packages, setup

setup(
    name="pygsd",
    version="0.1.0",
    author="pyGSD developers",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    url="https://github.com/pygsd/pyGSD/",
    download_url="",
    keywords=["weather", "sounding", "RAP", "GSD", "NOAA"],
    classifiers=[],
    license="Apache",
    description="Parser of NOAA GSL GSD formatted sounding reports.",
    python_requires=">=3.9",
    install_requires=[
        "metpy",
        "numpy",
        "pandas",
        "pydantic>=2",
        "shapely",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
)
