# SPDX-FileCopyrightText: 2025 SpeakPlan contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="speakplan",
    version="0.1.0",
    description="SpeakPlan mobile shell for voice-driven scheduling",
    license="MIT",
    packages=find_packages(include=["app", "app.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=["kivy>=2.2.0", "kivymd>=1.1,<2.0", "plyer>=2.1"],
    extras_require={
        # dev / testing
        "test": ["pytest>=8.0.0", "hypothesis>=6.0.0"],
    },
    entry_points={"gui_scripts": ["speakplan=main:main"]},
)
