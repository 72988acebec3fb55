from setuptools import setup
from Cython.Build import cythonize
import Cython.Compiler.Options
Cython.Compiler.Options.annotate = True


# optional: a failed C build leaves the plain .py modules in use
ext_modules = cythonize([
    "dpsat/formula.py"
    , "dpsat/branching.py"
    , "dpsat/dp.py"
    ])
for ext in ext_modules:
    ext.optional = True


setup(
    ext_modules = ext_modules
)
