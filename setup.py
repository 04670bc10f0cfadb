"""Sparsepoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import sparsepoly

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='sparsepoly',
    version=sparsepoly.__version__,
    description='Sparse univariate integer polynomials with multithreaded multiplication',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomial', 'sparse polynomial', 'polynomial arithmetic',
              'long division', 'multithreading'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=sparsepoly.__license__,
    packages=['sparsepoly'],
    platforms=['any'],
    python_requires='>=3.9',
    install_requires=['numpy', 'gmpy2']
)
