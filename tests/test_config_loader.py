################################################################################
# File Name: test_config_loader.py
# Purpose/Description: Tests for configuration loading and placeholder resolution
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Renamed from test_secrets_loader, statistics config
# ================================================================================
################################################################################

"""
Tests for the config_loader module.

Run with:
    pytest tests/test_config_loader.py -v
"""

import json
import os
import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from common.config_loader import (
    loadConfigWithEnvironment,
    loadEnvFile,
    resolvePlaceholders,
)


class TestLoadEnvFile:
    """Tests for loadEnvFile function."""

    def test_loadEnvFile_validFile_loadsVariables(self, tmp_path: Path, cleanEnv):
        """
        Given: Valid .env file
        When: loadEnvFile() is called
        Then: Variables are loaded into environment
        """
        envFile = tmp_path / '.env'
        envFile.write_text('TEST_VAR=test_value\n')

        result = loadEnvFile(str(envFile))

        assert os.environ.get('TEST_VAR') == 'test_value'
        assert result == {'TEST_VAR': 'test_value'}

    def test_loadEnvFile_commentsAndBlankLines_areSkipped(self, tmp_path: Path, cleanEnv):
        """
        Given: .env file with comments, blank lines and a bad line
        When: loadEnvFile() is called
        Then: Only the valid assignment is loaded
        """
        envFile = tmp_path / '.env'
        envFile.write_text('# comment\n\nNOT_AN_ASSIGNMENT\nSTATS_MODE=population\n')

        result = loadEnvFile(str(envFile))

        assert result == {'STATS_MODE': 'population'}

    def test_loadEnvFile_quotedValue_stripsQuotes(self, tmp_path: Path, cleanEnv):
        """
        Given: .env value wrapped in quotes
        When: loadEnvFile() is called
        Then: Quotes are removed
        """
        envFile = tmp_path / '.env'
        envFile.write_text('STATS_LOG_LEVEL="DEBUG"\nTEST_VAR=\'a b\'\n')

        loadEnvFile(str(envFile))

        assert os.environ['STATS_LOG_LEVEL'] == 'DEBUG'
        assert os.environ['TEST_VAR'] == 'a b'

    def test_loadEnvFile_existingVariable_isNotOverridden(self, tmp_path: Path, cleanEnv):
        """
        Given: Variable already set in environment
        When: loadEnvFile() is called with a different value
        Then: Existing value is kept
        """
        os.environ['TEST_VAR'] = 'original'
        envFile = tmp_path / '.env'
        envFile.write_text('TEST_VAR=from_file\n')

        result = loadEnvFile(str(envFile))

        assert os.environ['TEST_VAR'] == 'original'
        assert result == {}

    def test_loadEnvFile_missingFile_returnsEmpty(self, tmp_path: Path):
        """
        Given: .env path that does not exist
        When: loadEnvFile() is called
        Then: Returns empty dict without raising
        """
        assert loadEnvFile(str(tmp_path / 'missing.env')) == {}


class TestResolvePlaceholders:
    """Tests for resolvePlaceholders function."""

    def test_resolvePlaceholders_setVariable_isSubstituted(self, cleanEnv):
        """
        Given: Placeholder for a set variable
        When: resolvePlaceholders() is called
        Then: Value comes from the environment
        """
        os.environ['STATS_LOG_LEVEL'] = 'ERROR'

        result = resolvePlaceholders({'logging': {'level': '${STATS_LOG_LEVEL:WARNING}'}})

        assert result == {'logging': {'level': 'ERROR'}}

    def test_resolvePlaceholders_unsetWithDefault_usesDefault(self, cleanEnv):
        """
        Given: Placeholder with default for an unset variable
        When: resolvePlaceholders() is called
        Then: Default is used
        """
        result = resolvePlaceholders('${STATS_MODE:sample}')

        assert result == 'sample'

    def test_resolvePlaceholders_unsetWithoutDefault_keepsPlaceholder(self, cleanEnv):
        """
        Given: Placeholder without default for an unset variable
        When: resolvePlaceholders() is called
        Then: Placeholder text is left as is
        """
        assert resolvePlaceholders('${STATS_MODE}') == '${STATS_MODE}'

    def test_resolvePlaceholders_nestedListsAndNumbers_resolvedRecursively(self, cleanEnv):
        """
        Given: Nested lists with strings and numbers
        When: resolvePlaceholders() is called
        Then: Strings are resolved, numbers untouched
        """
        os.environ['TEST_VAR'] = 'x'

        result = resolvePlaceholders({'items': ['${TEST_VAR}', 3, None, 0.05]})

        assert result == {'items': ['x', 3, None, 0.05]}

    def test_resolvePlaceholders_embeddedPlaceholder_substitutesInPlace(self, cleanEnv):
        """
        Given: Placeholder inside a longer string
        When: resolvePlaceholders() is called
        Then: Only the placeholder is replaced
        """
        result = resolvePlaceholders('logs/${TEST_VAR:stats}.log')

        assert result == 'logs/stats.log'


class TestLoadConfigWithEnvironment:
    """Tests for loadConfigWithEnvironment function."""

    def test_loadConfigWithEnvironment_validFile_returnsResolvedConfig(
        self,
        tmp_path: Path,
        cleanEnv
    ):
        """
        Given: Config file with a placeholder and a matching .env file
        When: loadConfigWithEnvironment() is called
        Then: Returns config with the placeholder resolved
        """
        configFile = tmp_path / 'config.json'
        configFile.write_text(json.dumps({
            'analysis': {'varianceMode': '${STATS_MODE:sample}'}
        }))
        envFile = tmp_path / '.env'
        envFile.write_text('STATS_MODE=population\n')

        result = loadConfigWithEnvironment(str(configFile), str(envFile))

        assert result['analysis']['varianceMode'] == 'population'

    def test_loadConfigWithEnvironment_missingFile_raisesFileNotFound(self, tmp_path: Path):
        """
        Given: Config path that does not exist
        When: loadConfigWithEnvironment() is called
        Then: Raises FileNotFoundError
        """
        with pytest.raises(FileNotFoundError):
            loadConfigWithEnvironment(
                str(tmp_path / 'missing.json'),
                str(tmp_path / 'missing.env')
            )

    def test_loadConfigWithEnvironment_invalidJson_raisesDecodeError(self, tmp_path: Path):
        """
        Given: Config file with invalid JSON
        When: loadConfigWithEnvironment() is called
        Then: Raises json.JSONDecodeError
        """
        configFile = tmp_path / 'config.json'
        configFile.write_text('{not json')

        with pytest.raises(json.JSONDecodeError):
            loadConfigWithEnvironment(str(configFile), str(tmp_path / 'missing.env'))

    def test_loadConfigWithEnvironment_bundledConfig_loads(self, cleanEnv):
        """
        Given: The shipped stats_config.json
        When: loadConfigWithEnvironment() is called
        Then: Logging level placeholder resolves to its default
        """
        configPath = srcPath / 'stats_config.json'

        result = loadConfigWithEnvironment(str(configPath), str(srcPath / 'missing.env'))

        assert result['logging']['level'] == 'WARNING'
        assert result['analysis']['varianceMode'] == 'sample'
