import os
import toml
import unittest
from click.testing import CliRunner
from callreceiver import config
from callreceiver.main import cli
from unittest.mock import patch

class TestInitCommand(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_init_non_interactive(self):
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli, ['init', '--non-interactive'])
            self.assertEqual(result.exit_code, 0)
            with open('callreceiver.toml', 'r') as f:
                self.assertEqual(toml.load(f), config.DEFAULT_CONFIG)

    @patch('click.prompt')
    @patch('click.confirm')
    def test_init_command(self, mock_confirm, mock_prompt):
        mock_prompt.side_effect = [
            "native",                            # Android project directory
            "app/src/main/AndroidManifest.xml",  # Manifest path
        ]
        mock_confirm.return_value = True         # Strict entry-point patching

        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli, ['init'])
            self.assertEqual(result.exit_code, 0)
            self.assertTrue(os.path.exists('callreceiver.toml'))

            with open('callreceiver.toml', 'r') as f:
                conf = toml.load(f)
            self.assertEqual(conf["android"]["project_root"], "native")
            self.assertIs(conf["entry_point"]["strict"], True)

if __name__ == '__main__':
    unittest.main()
