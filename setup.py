"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='eswalk',
	version='0.1.0',
	packages=['eswalk'],
	entry_points={
		'console_scripts': ["eswalk = eswalk.cmdline:main"],
	},
	license='MIT',
	description='Walk, scope, and block-normalize ECMAScript syntax trees',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Compilers",
		"Topic :: Software Development :: Quality Assurance",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
