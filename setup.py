from setuptools import setup, find_packages

setup(
    name="rounded-box-lattice",
    version="0.1.0",
    description="Beveled box meshes and lattice layouts for placing them in a scene",
    author="",
    packages=find_packages(exclude=["tests"]),
    py_modules=["box_scene"],
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "trimesh",
        "matplotlib",
        "tqdm",
        "networkx",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
