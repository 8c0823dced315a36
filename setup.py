#!/usr/bin/env python3
#
#   Copyright 2026 - The Android Open Source Project
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

import setuptools

install_requires = [
    # mobly.snippet.callback_event first shipped in 1.12.
    'mobly>=1.12',
]

tests_require = [
    'mock',
    'pytest',
]

setuptools.setup(name='sl4a_events',
                 version='0.9',
                 description='ConnectivityManager callback events for the '
                             'Android Comms Test Suite',
                 license='Apache2.0',
                 packages=setuptools.find_packages(include=('sl4a_events*',)),
                 include_package_data=False,
                 install_requires=install_requires,
                 extras_require={'test': tests_require},
                 python_requires='>=3.7',
                 url="http://www.android.com/")
