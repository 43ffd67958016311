from setuptools import setup,find_packages

setup(name='ndvector',
    version='0.1.0',
    packages=find_packages(),
    python_requires='>=3.10',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
    author='Micah Smith',
    author_email='mykahsmith21@gmail.com',
    description='Variable-dimension numeric vectors with elementwise arithmetic'
)
