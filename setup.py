import setuptools

setuptools.setup(
    name='protojava',
    version='0.1',
    license='MIT',
    zip_safe=False,
    packages=setuptools.find_packages(include=['protojava', 'protojava.*']),
    package_data={'protojava.tests': ['data/*.yaml']},
    fullname='protojava Java Generator',
    python_requires='>=3.8',
    install_requires=[
        'pyyaml', 'rich', 'fastjsonschema', 'rapidfuzz'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['protojava=protojava.main:main'],
    },
    description='Driver that turns a parsed schema description into generated Java sources.',
)
