import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="solaroptics",
    version="0.1.0",
    author="solaroptics developers",
    description="Focal spot, power and efficiency modeling of single lens "
                "solar concentrators",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={'': 'src'},
    packages=setuptools.find_packages(where='src'),
    python_requires='>=3.10',
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['solar concentrator', 'photovoltaics', 'paraxial optics',
              'ABCD matrix', 'thin lens', 'focal spot'],
    install_requires=[
        "numpy>=1.24.4",
        "matplotlib>=3.5",
        "pandas>=1.5",
        "attrs>=22.1.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
)
