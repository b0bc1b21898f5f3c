import sys

if sys.version_info < (3, 9):
    raise Exception("The readcount code needs Python 3.9 or later.")

# Note that the version string below must have the following format,
# otherwise it will not be found by the version() function in ../setup.py
__version__ = "1.0.0"
