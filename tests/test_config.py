import logging
import pytest

from rsphysics import config
from rsphysics.exceptions import ConfigurationException, assert_required_keywords_provided


class TestConfigClass:

    def test_builtin(self):
        cfg = config.load_config_file(config.BUILTIN_CONFIG_FILE)
        assert cfg['integration']['step'] == 0.01
        assert cfg['split_window'] == {'a0': 0.0, 'a1': 0.5, 'a2': 0.5}
        assert set(cfg['ranged']['airborne']) == set(config.AIRBORNE_KEYS)

    def test_override(self, tmp_path):
        user = tmp_path / 'config.yaml'
        user.write_text("integration:\n  step: 0.05\nmicrowave:\n  sensitivity:\n    c: 2.0\n")
        cfg = config.get_config([str(user)])
        assert cfg['integration']['step'] == 0.05
        assert cfg['integration']['coarse_step'] == 0.1
        assert cfg['microwave']['sensitivity'] == {'c': 2.0, 'del_t': 0.01, 'del_f': 0.01}

    def test_empty_file(self, tmp_path):
        empty = tmp_path / 'empty.yaml'
        empty.write_text("")
        assert config.load_config_file(str(empty)) == {}

    def test_invalid(self, tmp_path):
        bad = tmp_path / 'bad.yaml'
        bad.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationException):
            config.get_config([str(bad)])
        broken = tmp_path / 'broken.yaml'
        broken.write_text("integration: [step\n")
        with pytest.raises(ConfigurationException):
            config.load_config_file(str(broken))
        with pytest.raises(ConfigurationException):
            config.load_config_file(str(tmp_path / 'missing.yaml'))

    def test_recursive_dict_update(self):
        d = {'a': {'b': 1, 'c': 2}, 'd': 3}
        assert config.recursive_dict_update(d, {'a': {'b': 5}}) == {'a': {'b': 5, 'c': 2}, 'd': 3}

    def test_required_keywords(self):
        assert_required_keywords_provided(['a'], a=1)
        with pytest.raises(ConfigurationException):
            assert_required_keywords_provided(['a', 'b'], a=1, b=None)

    def test_logging_switch(self):
        log = logging.getLogger('rsphysics')
        before = len(log.handlers)
        config.debug_on()
        assert log.level == logging.DEBUG
        assert len(log.handlers) == before + 1
        config.logging_on()
        assert len(log.handlers) == before + 1
        config.logging_off()
        assert len(log.handlers) == before
        assert log.level == logging.NOTSET
