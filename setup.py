from setuptools import setup

setup(
    name='jet-stack',
    version='0.1.0',
    python_requires='>=3.10',
    install_requires=[
        'google-cloud-storage',
    ],
    extras_require={'test': ['pytest']},
    packages=['jet_stack',
              'jet_stack.env',
              'jet_stack.simulation',
              'jet_stack.utils'],
)
