from setuptools import setup, find_packages
import alloctop

setup(
    name='alloctop',
    version=alloctop.__version__,
    description='Tool for analyzing memory allocations from /proc/allocinfo',
    python_requires='>=3.9',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'click>=8.0', 'termcolor>=2.1',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points='''
        [console_scripts]
        alloctop=alloctop.cli:launch_cli
    ''',
)
