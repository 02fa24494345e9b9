from Cython.Build import cythonize
from setuptools import setup

setup(
    ext_modules=cythonize(
        "markup_cythonized/*.py",
        exclude=[
            "markup_cythonized/__init__.py",
            "markup_cythonized/templatetags.py",
        ],
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": True,
            "cdivision": True,
            "infer_types": True,
            "profile": False,
        },
    ),
)
