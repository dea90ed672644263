#!/usr/bin/python3
import setuptools

setuptools.setup(
    name='kmp',
    version='0',
    description='Knuth-Morris-Pratt matching for Python, batch and streaming',
    author='Karl Ramm',
    author_email='karl.ramm@gmail.com',
    license='BSD',
    classifiers=[
        'Programming Language :: Python',
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        ],
    py_modules=['kmp'],
    install_requires=[],
    extras_require={'test': ['pytest']},
    )
