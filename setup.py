#
# Copyright Elasticsearch B.V. and/or licensed to Elasticsearch B.V. under one
# or more contributor license agreements. Licensed under the Elastic License 2.0;
# you may not use this file except in compliance with the Elastic License 2.0.
#
import os
import sys

from setuptools import find_packages, setup


def ensure_python_3_10_or_higher():
    if sys.version_info < (3, 10):
        msg = "Requires Python 3.10 or higher."
        raise ValueError(msg)


ensure_python_3_10_or_higher()

from estemplate import __version__  # NOQA

# We feed install_requires with the requirements files but we unpin versions
# so we don't enforce them and trap folks into dependency hell. (only works
# with `==` here)
#
# The *pinned* dependencies are what we tested:
#
# $ pip install -r requirements/tests.txt
#


def extract_req(req):
    req = req.strip().split(";")[0]
    req = req.split("=")
    return req[0]


def read_reqs(req_file):
    deps = []
    reqs_dir, __ = os.path.split(req_file)

    with open(req_file) as f:
        reqs = f.readlines()
        for req in reqs:
            req = req.strip()
            if req == "" or req.startswith("#"):
                continue
            if req.startswith("-r"):
                subreq_file = req.split("-r")[-1].strip()
                subreq_file = os.path.join(reqs_dir, subreq_file)
                for dep in read_reqs(subreq_file):
                    if dep not in deps:
                        deps.append(dep)
            else:
                dep = extract_req(req)
                if dep not in deps:
                    deps.append(dep)
    return deps


install_requires = read_reqs(os.path.join("requirements", "framework.txt"))
tests_require = [
    dep
    for dep in read_reqs(os.path.join("requirements", "tests.txt"))
    if dep not in install_requires
]


with open("README.md") as f:
    long_description = f.read()


classifiers = [
    "Programming Language :: Python",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3 :: Only",
]


setup(
    name="estemplate",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"estemplate": ["VERSION"]},
    description=("Declarative builders for Elasticsearch index templates."),
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    zip_safe=False,
    classifiers=classifiers,
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={"tests": tests_require},
    entry_points="""
      [console_scripts]
      estemplate = estemplate.cli:main
      """,
)
