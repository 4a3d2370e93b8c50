"""Setup file."""

from setuptools import setup, find_packages
import pathlib

here = pathlib.Path(__file__).parent.resolve()

# Get the long description from the README file
long_description = (here / 'README.md').read_text(encoding='utf-8')

setup(
    name='procrustean',
    version='0.1.0',
    description='Procrustes superimposition of corresponding point sets.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    author='The Procrustean Authors',
    license='Apache Licence 2.0',
    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Mathematics',

        'License :: OSI Approved :: Apache Software License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
    keywords='procrustes, kabsch, alignment, rotation, point sets',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.8',
    install_requires=[
        'numpy', 'scipy', 'matplotlib'
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
)
