#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = []

test_requirements = [
    'pytest',
]

setup(
    name='prettyfit',
    version='0.1.0',
    description="Wadler-style pretty printing documents laid out to a page width",
    long_description=readme,
    author="Tommi Kaikkonen",
    author_email='kaikkonentommi@gmail.com',
    packages=find_packages(include=['prettyfit']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.6',
    license="MIT license",
    zip_safe=False,
    keywords='prettyfit pretty printer wadler',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    tests_require=test_requirements,
)
