from setuptools import setup

setup(
    name='feedicon',
    version='0.1.0',
    packages=['feedicon', 'feedicon.icons'],
    python_requires='>=3.8',
    install_requires=[
        'Flask>=2.3',
        'click>=8.0',
        'requests>=2.28',
        'feedparser>=6.0',
        'tomli>=1.1; python_version < "3.11"',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    entry_points={
        'console_scripts': ['feedicon=feedicon:cli'],
    },
    include_package_data=True,
    zip_safe=False,
)
