from setuptools import find_packages, setup

version = open('version.txt').read().strip()


classifiers = [ 'Development Status :: 4 - Beta'
              , 'Environment :: Web Environment'
              , 'Intended Audience :: Developers'
              , 'License :: OSI Approved :: MIT License'
              , 'Natural Language :: English'
              , 'Operating System :: OS Independent'
              , 'Programming Language :: Python :: 3'
              , 'Programming Language :: Python :: Implementation :: CPython'
              , 'Topic :: Internet :: WWW/HTTP :: WSGI'
               ]

setup( author = 'forbrowsers contributors'
     , classifiers = classifiers
     , description = 'Method tunneling and browser detection for RESTful request objects'
     , name = 'forbrowsers'
     , packages = find_packages(exclude=['tests', 'tests.*', 'benchmarks'])
     , python_requires = '>=3.7'
     , version = version
     , zip_safe = False
     , install_requires = open('requirements.txt').read()
     , extras_require = {'tests': open('requirements_tests.txt').read().split()}
      )
