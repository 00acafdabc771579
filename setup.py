from setuptools import setup, find_packages
setup(
    name="parcel_tracker",
    version="0.0.1",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["pydantic>=2"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'parcel_tracker=parcel_tracker.__main__:main'
        ]
    }
)
