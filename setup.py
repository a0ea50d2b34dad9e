# coding: utf-8
from setuptools import find_packages, setup


with open('README.md', encoding='utf8') as file:
    long_description = file.read()

setup(
    name='veryfi-client',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    license='MIT',
    description='Python client for the Veryfi document OCR partner API',
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'requests',
    ],
    extras_require={
        'httpx': ['httpx'],
        'requests': ['requests'],
        'test': ['pytest', 'httpx'],
    },
)
