"""
Theme support for Django: themed template loading, asset template tags and theme scaffolding commands.
"""
from setuptools import find_packages, setup


with open('README.rst') as readme:
    long_description = readme.read()

setup(
    name='django-themevel',
    version='0.1.0',
    description='Swappable themes for Django views and assets',
    long_description=long_description,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Framework :: Django',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
    ],
    keywords='django themes templates assets',
    license='MIT',
    packages=find_packages(exclude=['*.tests', '*.tests.*']),
    include_package_data=True,
    package_data={
        'themevel': ['stubs/*/*', 'stubs/*/*/*'],
    },
    python_requires='>=3.9',
    install_requires=[
        'Django',
        'django-threadlocals',
        'django-waffle',
        'path>=17',
    ],
    extras_require={
        'test': [
            'ddt',
            'mock',
            'pytest',
            'pytest-django',
            'testfixtures',
        ],
    },
)
