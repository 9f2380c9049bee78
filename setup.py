import os

import setuptools


def local_file(name: str) -> str:
    """Interpret filename as relative to this file."""
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


SOURCE = local_file("src")
README = local_file("README.md")

with open(local_file("src/bintree/__init__.py")) as o:
    for line in o:
        if line.startswith("__version__"):
            _, __version__, _ = line.split('"')


setuptools.setup(
    name="bintree",
    version=__version__,
    packages=setuptools.find_packages(SOURCE),
    package_dir={"": SOURCE},
    package_data={"": ["py.typed", "docs/changelog.md"]},
    license="AGPL-3.0",
    description="An unbalanced binary search tree with preorder traversal",
    zip_safe=False,
    install_requires=[
        "click >= 8.0.0",
    ],
    extras_require={
        "test": [
            "hypothesis >= 6.50.1",
            "pytest >= 6.0.1",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
    entry_points={"console_scripts": ["bintree-bench = bintree.bench:main"]},
    long_description=open(README).read(),
    long_description_content_type="text/markdown",
    keywords="python binary-search-tree data-structures",
)
