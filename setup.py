from setuptools import setup, find_packages

setup(
    name="KP_Solvers",
    version="0.1.0",
    description="Exact 0/1 (dynamic programming) and fractional (greedy) knapsack solvers.",
    packages=find_packages(include=["kp_solvers", "kp_solvers.*", "Scripts"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "pyyaml",
        "tqdm",
        "matplotlib",
        "seaborn",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'kp-solve = Scripts.solve:main',
            'kp-generate = Scripts.generate_data:main',
            'kp-evaluate = Scripts.evaluate_solvers:main',
        ],
    }
)
