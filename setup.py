from setuptools import setup, find_packages

setup(name='thompyl',
      packages=find_packages(exclude=("tests",)),
      version='0.1.0',
      description='Thompson construction and simulation of finite automata',
      install_requires=[
        'dill',
      ],
      extras_require={
        'test': ['pytest'],
      },
      python_requires='>=3.6',
      keywords='automaton nfa dfa thompson regexp',
      classifiers=[
          'Development Status :: 4 - Beta',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Software Development :: Compilers',
          'License :: OSI Approved :: MIT License',
          'Intended Audience :: Developers',
      ]
      )
