from setuptools import setup, find_packages
setup(
    name='reqres-probe',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    description='Integration tests for the ReqRes user, registration and login API.',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'requests>=2.25.0',
        'pydantic>=2.0.0',
        'pytest>=7.0.0',
        'fastapi>=0.100.0',
        'httpx>=0.24.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
        ],
    },
    entry_points={
        'pytest11': [
            'reqres_probe = reqres_probe.pytest_plugin',
        ],
        'console_scripts': [
            'reqres-probe = reqres_probe.cli:program.run',
        ],
    },
)
