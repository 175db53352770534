from setuptools import setup, find_packages

setup(
    name='relcalc',
    version='0.0.1',
    description='In-memory relational algebra calculator',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests", "test_scripts"]),
    license='Apache License 2.0',
    install_requires=[

        'pyyaml',
        'pandas',

    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
