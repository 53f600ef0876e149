import os
from setuptools import setup

readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
with open(readme_path, encoding='utf8') as f:
    readme = f.read()

setup(
    name='parray',
    version='0.1.0',
    description='Persistent, index addressable array with value semantics',
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT',
    py_modules=['_parray_version'],
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    install_requires=['immutables'],
    extras_require={'test': ['pytest', 'hypothesis', 'typing_extensions']},
    packages=['parray'],
    package_data={'parray': ['py.typed', '__init__.pyi']},
    python_requires='>=3.9',
)
