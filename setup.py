import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="twig_cs_formatter",
    version="0.1.0",
    description="Format Twig templates with prettier and fix what it gets wrong for the Twig coding standard",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Text Processing :: Markup :: HTML",
        "Intended Audience :: Developers",
    ],
    keywords="twig symfony template formatter prettier coding standard",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "twig_cs_formatter=twig_cs_formatter.twig_cs_formatter:twig_cs_formatter",
        ],
    },
    zip_safe=False,
)
