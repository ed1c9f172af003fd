from setuptools import setup, find_packages

setup(
    name='jointspy',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pydantic>=2',
        'omegaconf',
    ],
    extras_require={
        'dev': [
            'pytest>=6.0',
        ],
    },
)
