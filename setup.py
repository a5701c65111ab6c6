from setuptools import setup, find_packages
setup( 
    name = "webstatic",
    version = "0.1.0.dev1",
    description = "Static analysis core for web projects",
    author = "Various Developers",
    packages = find_packages(exclude=['tests']),
    install_requires = [
        'attrs>=21.3',
        'beniget',
        ],
    extras_require = {
        'test': ['pytest'],
        },
    python_requires='>=3.8',
    )
