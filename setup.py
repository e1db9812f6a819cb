from setuptools import setup, find_packages

setup(
    name='check_cmm',
    version='1.0.0',
    author='bb-Ricardo',
    author_email='ricardo@bitchbrothers.com',
    description='A monitoring plugin to check the health status of IBM/Lenovo PureFlex chassis via the CMM using SNMP.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        'pysnmp>=6.1.0,<6.2',
        'pyasn1>=0.4.8,<0.6.1',
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        "Environment :: Console",
        'Programming Language :: Python :: 3',
        "Topic :: System :: Monitoring",
    ],
    python_requires='>=3.8',
    py_modules=["check_cmm"],
    entry_points={
        'console_scripts': [
            'check_cmm=check_cmm:main',
        ],
    },
)
