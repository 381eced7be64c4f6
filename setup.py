#!/usr/bin/python3
#
# Copyright (C) 2026  schannel-admin Contributors see COPYING for license
#

"""
Python-level packaging using setuptools.
"""

from setuptools import setup

from schpython.version import VERSION

setup(
    name='schannel-admin',
    version=VERSION,
    description='Toggle server-side SCHANNEL protocols',
    license='GPLv3+',
    python_requires='>=3.8',
    packages=[
        'schlib',
        'schplatform',
        'schplatform.base',
        'schplatform.win32',
        'schpython',
        'schserver',
        'schserver.install',
        'schtests',
        'schtests.test_schlib',
        'schtests.test_schplatform',
        'schtests.test_schpython',
        'schtests.test_schserver',
    ],
    entry_points={
        'console_scripts': [
            'get-protocol-status = '
            'schserver.install.protocol_status:GetProtocolStatus.run_cli',
            'set-protocol-status = '
            'schserver.install.protocol_status:SetProtocolStatus.run_cli',
        ],
    },
    extras_require={
        'test': ['pytest'],
    },
    data_files=[('share/schannel-admin', ['install/conf/default.conf'])],
)
