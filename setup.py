# -*- coding: utf-8 -*-
import codecs
from setuptools import setup, find_packages


tests_require = [
    'Flask>=2.0',
    'pytest>=7.0',
]

setup(
    name='HyperAgent',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*', 'examples']),
    license='MIT',
    description='Hypermedia API client that discovers relations from JSON hyper-schemas',
    long_description=codecs.open('README.rst', encoding='utf-8').read(),
    python_requires='>=3.7',
    install_requires=[
        'requests>=2.20',
        'jsonschema>=3.0',
        'blinker>=1.4',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'examples': ['Flask>=2.0'],
        'tests': tests_require,
    }
)
