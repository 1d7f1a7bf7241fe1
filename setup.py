from setuptools import setup

setup(
    name='loadout_graph',
    version='0.13.0',
    packages=['loadout', 'loadout.config', 'loadout.config.models', 'loadout.config.migrations'],
    python_requires='>=3.10',
    install_requires=[
        'pydantic>=2.0',
        'packaging>=22.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    license='Apache License, Version 2.0',
    description='Versioned graph widget configuration schema with version-ordered loadout migration'
)
