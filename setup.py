# setup.py
from setuptools import setup, find_packages

setup(
    name="fsglob",
    version="0.1.0",
    description="Shell-style glob matching over a simulated working directory",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente el paquete 'fsglob'
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fsglob=fsglob.main:main',  # Permite ejecutar el glob vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
