from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqView",
    version=version,
    description="Linked, composable views over indexable containers (lists, arrays, etc.)",
    long_description=long_description,
    keywords=['view', 'slice', 'mask', 'indexing', 'lazy'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research"],
    packages=find_packages(include=['seqview', 'seqview.*']),
    python_requires='>=3.6',
    extras_require={
        'numpy support': [
            'numpy'],
        'tests': [
            'pytest', 'numpy', 'coverage']
    }
)
