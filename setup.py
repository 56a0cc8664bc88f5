# #!/usr/bin/env python

"""setup.py script for py_vecmath library"""

from setuptools import setup

setup(
    name="py_vecmath",
    version="1.0.0",
    description="Generic 2/3/4-component vector math with dimension-checked length and angle units",
    packages=["py_vecmath"],
    python_requires=">=3.9",
    install_requires=[
        "typing_extensions>=4.12.0",
        "tomli>=2.0.1; python_version<'3.11'",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
