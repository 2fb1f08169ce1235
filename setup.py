"""
shimkit - compatibility and object-composition helpers

This setup.py file is provided for pip install compatibility.
"""

from setuptools import setup

if __name__ == "__main__":
    setup(
        name="shimkit",
        version="0.1.0",
        description="Uniform iteration, merge/extend, single-parent inheritance and vendor-prefixed member resolution.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=[
            "shimkit",
            "shimkit.core",
            "shimkit.core.config",
            "shimkit.core.utils",
        ],
        python_requires=">=3.11",
        install_requires=[
            "pydantic>=2.0",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": ["pytest>=7.0"],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries",
        ],
    )
