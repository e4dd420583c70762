from setuptools import setup
import os.path

# Grab information about package without loading it
about = {}
with open(os.path.join('pyrefract', '__about__.py')) as f:
    exec(f.read(), about)

setup(
    name = about["__fullname__"].lower(),
    version = about["__version__"],
    description = about["__description__"],
    long_description = about["__long_description__"],
    classifiers = [
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Physics",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ],
    keywords = "refraction ray tracing optics atmosphere physics",
    author = about["__author__"],
    author_email = about["__author_email__"],
    license = about["__license__"],
    packages = ['pyrefract'],
    python_requires = '>= 3.6',
    install_requires = [
        'numpy>=1.17',
        'scipy>=1.4',
        'h5py>=3.0',
    ],
    tests_require = ['pytest'],
    extras_require = {
        'test': ['pytest'],
    },
)
