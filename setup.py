#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

setup(name ="windles",
      description="Actuator disk wind farms for structured LES grids",
      version="2024.06.01",
      include_package_data=True,
      packages=['windles','windles.turbine_types','windles.wind_farm_types','windles_driver'],
      package_data={'windles': ['default_parameters.yaml']},
      python_requires=">=3.8",
      install_requires=['numpy','pandas','pyyaml','matplotlib'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts' : ['windles = windles_driver.driver:main'],},

)
