#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
from setuptools import setup, find_packages
# https://setuptools.pypa.io/en/latest/userguide/

# Get version info
__version__ = None
__release__ = None
exec(open('jsgettext/version.py').read())


def content_of(*files):
    here = os.path.abspath(os.path.dirname(__file__))
    content = []
    for f in files:
        with open(os.path.join(here, f), encoding='utf-8') as stream:
            content.append(stream.read())
    return '\n'.join(content)


setup(name='jsgettext',
      version=__release__,
      description='Extract gettext strings from JavaScript, JSX and HTML '
                  'into a .pot template',
      long_description=content_of('README.rst', 'CHANGES.rst'),
      long_description_content_type='text/x-rst',
      classifiers=[  # https://pypi.org/classifiers/
          'Development Status :: 4 - Beta',
          'Environment :: Console',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: MIT License',
          'Operating System :: OS Independent',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy',
          'Topic :: Software Development :: Internationalization',
          'Topic :: Software Development :: Localization',
          'Topic :: Text Processing :: Markup :: HTML',
      ],
      keywords='gettext i18n l10n javascript jsx html pot babel xgettext',
      license='MIT',
      packages=find_packages(exclude=['tests', 'tests.*']),
      include_package_data=True,
      zip_safe=False,
      install_requires=['babel'],
      python_requires='>=3.8',
      extras_require={
          'testing': ['pytest'],
      },
      entry_points="""
          [console_scripts]
          jsgettext = jsgettext.__main__:main

          [babel.extractors]
          jsgettext = jsgettext.i18n:extract
      """,
)
