#!/usr/bin/env python3
"""
nativekit host configuration tests
"""

import logging
import unittest
import sys
from pathlib import Path

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

import host_config
from host_config import HostConfig, load_config

class TestLoadConfig(unittest.TestCase):

    def test_defaults(self):
        config = load_config({})
        self.assertEqual(config, HostConfig())
        self.assertTrue(config.native_accessors)
        self.assertTrue(config.native_prototypes)
        self.assertFalse(config.weak_identities)

    def test_environment_flags(self):
        config = load_config({
            'NATIVEKIT_NATIVE_ACCESSORS': 'off',
            'NATIVEKIT_WEAK_IDENTITIES': 'Yes',
            'NATIVEKIT_LOG_LEVEL': 'debug',
        })
        self.assertFalse(config.native_accessors)
        self.assertTrue(config.weak_identities)
        self.assertEqual(config.log_level, 'DEBUG')

    def test_invalid_flag(self):
        with self.assertRaises(ValueError):
            load_config({'NATIVEKIT_NATIVE_PROTOTYPES': 'maybe'})

class TestProcessConfig(unittest.TestCase):

    def setUp(self):
        self.saved = host_config.get_config()
        host_config.set_config(HostConfig())

    def tearDown(self):
        host_config.set_config(self.saved)

    def test_switches(self):
        host_config.enable_native_accessors(False)
        host_config.enable_weak_identities()
        self.assertFalse(host_config.get_config().native_accessors)
        self.assertTrue(host_config.get_config().weak_identities)

    def test_capability_summary(self):
        summary = host_config.capability_summary()
        self.assertEqual(summary['native_prototypes'], True)
        self.assertIn('python', summary)

    def test_setup_logging(self):
        logger = host_config.setup_logging('debug', 'simple')
        self.assertEqual(logger.name, 'nativekit')
        self.assertEqual(logger.level, logging.DEBUG)
        host_config.setup_logging('WARNING')
        self.assertEqual(logging.getLogger('nativekit').level, logging.WARNING)

if __name__ == '__main__':
    unittest.main(verbosity=2)
