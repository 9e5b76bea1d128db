from setuptools import find_packages, setup


setup(
    author="benchman developers",
    python_requires='>=3.10',
    description="A RAII-style one-shot benchmark tool",
    include_package_data=True,
    keywords='benchman',
    name='benchman',
    packages=find_packages(include=['benchman', 'benchman.*']),
    version='0.0.1',
    install_requires=[
        'numpy',
        'pandas',
        'rich',
        'wandb',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
