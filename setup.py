import io

from setuptools import find_packages
from setuptools import setup

with io.open("README.md", "rt", encoding="utf8") as f:
    readme = f.read()

tests_require = [
    "pytest",
    "pytest-click",
    "pytest-mock",
]

setup(
    name="pagenav",
    version="0.1.0",
    description="Computes and renders pagination menus.",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="BSD",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"pagenav": ["translations/*.json"]},
    zip_safe=False,
    platforms="any",
    python_requires=">=3.7",
    install_requires=[
        "Babel",
        "click>=8.0",
        "inifile>=0.4.1",
        "Jinja2>=2.11",
        "MarkupSafe",
    ],
    tests_require=tests_require,
    extras_require={
        "test": tests_require,
    },
    classifiers=[
        "Environment :: Web Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    entry_points="""
        [console_scripts]
        pagenav=pagenav.cli:main
    """,
)
