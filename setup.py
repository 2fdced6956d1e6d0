from setuptools import setup, find_packages

setup(
   name='autocorrelation',
   version='0.1.0',
   description='Autocorrelation coefficients of a series for any lag',
   packages=find_packages(include=['autocorrelation', 'autocorrelation.*']),
   install_requires=['numpy'], #external packages as dependencies
   extras_require={
		'tests' : ['pytest', 'pandas'],
   },
   python_requires='>=3.8',
)
