"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='narsese-lang',
	version='0.1.0',
	packages=['narsese'],
	entry_points={
		'console_scripts': ["narsese = narsese.cmdline:main"],
	},
	license='MIT',
	description='Parse, fold, and format Narsese in ASCII, LaTeX, and Han notations',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Science/Research",
		"Topic :: Scientific/Engineering :: Artificial Intelligence",
		"Topic :: Text Processing :: Linguistic",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
