from setuptools import setup, find_packages

setup(
    name='graphkit',
    version='1.0.0',
    description='In-memory graph with traversal, shortest paths, centrality, set algebra and layout',
    packages=find_packages(include=['graphkit', 'graphkit.*']),
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    python_requires='>=3.8',
)
