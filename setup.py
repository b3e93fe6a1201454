from setuptools import find_packages, setup
import fusion_blacklist


# parses requirements from file
with open("requirements.txt") as f:
    required = f.read().splitlines()

with open("README.md", "r") as f:
    long_description = f.read()

# Build the Python package
setup(
    name="fusion_blacklist",
    version=fusion_blacklist.__version__,
    packages=find_packages(include=["fusion_blacklist", "fusion_blacklist.*"]),
    package_data={"fusion_blacklist.tests": ["resources/*"]},
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "fusion-blacklist=fusion_blacklist.command_line:fusion_blacklist_cli",
        ],
    },
    author_email="patrick.sorn@tron-mainz.de",
    author="TRON - Translational Oncology at the University Medical Center of the Johannes Gutenberg University Mainz "
           "- Computational Medicine group",
    description="Removes fusion candidates matching blacklisted ranges, positions, genes and support rules",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    requires=[],
    install_requires=required,
    extras_require={"test": ["pytest"]},
    setup_requires=[],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
    ],
)
