# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="reactdts",
    version="0.2.0",
    description="Generate TypeScript ambient module declarations from React class components",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["reactdts", "reactdts.*"]),
    python_requires=">=3.9",
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-typescript>=0.23",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        'console_scripts': [
            'reactdts=reactdts.main:run',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
