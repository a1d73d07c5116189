import os
import sys

from .test import test_main

# make sharpbasic package accessible if run from top level
HERE = os.path.dirname(os.path.abspath(__file__))
sys.path = [os.path.join(HERE, '..')] + sys.path

# run tests
test_main()
