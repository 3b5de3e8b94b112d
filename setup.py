from os import path

from setuptools import setup

with open(path.join(path.dirname(__file__), 'README.rst')) as f:
    long_description = f.read().strip()

setup(
    name='starsrp',
    version='0.1.0',
    packages=['starsrp'],
    install_requires=[
        'cryptography>=3.1',
    ],
    description='SRP password check generator for stars revenue withdrawal',
    long_description=long_description,
    license='MIT',
    python_requires='>=3.6.0',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Security :: Cryptography',
        'Topic :: Software Development :: Libraries',
    ],
)
