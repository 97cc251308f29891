from setuptools import setup

setup(
    name="digraphs",
    version="0.1.0",
    description="Generic directed graphs with strongly connected components",
    license="MIT",
    packages=["digraphs", "digraphs.templates"],
    python_requires=">=3.7",
    install_requires=[
        "Jinja2>=3,<4",
        "PyYAML>=5.1",
    ],
    extras_require={"test": ["pytest>=6"]},
    package_data={"digraphs.templates": ["*.jinja"],},
)
