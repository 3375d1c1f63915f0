# setup.py

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='timebench',
    version='0.1.0',
    author='Justin Arndt',
    author_email='justinarndtai@gmail.com',
    description='A micro-benchmarking harness with pause/resume/lap timing',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=['timebench', 'timebench.*']),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'timebench-sort=timebench.tools.sort_cli:main',
        ],
    },
    zip_safe=False,
    python_requires='>=3.8',
)
