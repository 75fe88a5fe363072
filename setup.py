#! /usr/bin/env python

# This file is part of diggeo.
# Copyright 2025 The diggeo authors
#
# diggeo is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# diggeo is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public
# License for more details.
#
# You should have received a copy of the GNU General Public License
# along with diggeo. If not, see <http://www.gnu.org/licenses/>.

"""Standard setup.py file. Run

$ pip install .
"""


import os

from setuptools import setup
from setuptools.command.install_lib import install_lib


VERSION = __import__("diggeo").VERSION


# installs made from an sdist or a wheel have no git repository to
# ask for the version
with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "diggeo", "VERSION"), "w"
) as fdesc:
    fdesc.write(VERSION)


class smart_install_lib(install_lib):
    """Replacement for setuptools' install_lib to handle version
    file.

    """

    def run(self):
        super().run()
        fullfname = os.path.join(self.install_dir, "diggeo", "__init__.py")
        if not os.path.exists(fullfname):
            return
        tmpfname = "%s.tmp" % fullfname
        stat = os.stat(fullfname)
        os.rename(fullfname, tmpfname)
        with open(fullfname, "w") as newf:
            with open(tmpfname) as oldf:
                for line in oldf:
                    if line.startswith("import "):
                        newf.write("__version__ = VERSION = %r\n" % VERSION)
                        break
                    newf.write(line)
        os.chmod(fullfname, stat.st_mode)
        os.unlink(tmpfname)


with open(
    os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.md")
) as fdesc:
    long_description = fdesc.read()
long_description_content_type = "text/markdown"


setup(
    name="diggeo",
    version=VERSION,
    author="The diggeo authors",
    license="GPLv3+",
    description="Look up the country of IP addresses or domain names",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    keywords=[
        "network",
        "geolocation",
        "geoip",
        "dns",
        "ipgeolocation",
    ],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Networking",
        "Topic :: System :: Networking :: Monitoring",
    ],
    python_requires=">=3.8, <4",
    install_requires=[
        "requests",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    packages=[
        "diggeo",
        "diggeo.tools",
    ],
    package_data={
        "diggeo": ["VERSION"],
    },
    scripts=["bin/diggeo"],
    data_files=[
        ("share/diggeo", ["etc/diggeo.conf"]),
    ],
    cmdclass={"install_lib": smart_install_lib},
)
