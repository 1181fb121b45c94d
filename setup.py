from setuptools import setup

setup(
    name='atmfjstc-header-table',
    version='0.1.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.header_table', 'atmfjstc.lib.header_table.cli'],

    install_requires=[
        'termcolor>=2.2, <4',
        'colorama>=0.4.6, <2',
    ],
    extras_require={
        'test': [
            'pytest>=7',
        ],
    },

    entry_points={
        'console_scripts': [
            'header-table=atmfjstc.lib.header_table.cli:main',
        ],
    },

    zip_safe=True,

    description="Bit-level extraction and tabular display of fixed-layout binary headers",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
