import os
from configparser import ConfigParser

DEFAULT_EVALUE_CUTOFF = 0.3
DEFAULT_MAX_MATE_GAP = 10


class BlacklistFilterConfiguration(ConfigParser):

    def __init__(self, config_file):
        super().__init__()
        self.config_file = os.path.abspath(config_file)
        assert os.path.exists(self.config_file), "Config file {} does not exist!".format(self.config_file)
        self.load_configuration()

    def load_configuration(self):
        self.read(self.config_file)

    def get_evalue_cutoff(self) -> float:
        return self.getfloat("blacklist", "evalue_cutoff", fallback=DEFAULT_EVALUE_CUTOFF)

    def get_max_mate_gap(self) -> int:
        return self.getint("blacklist", "max_mate_gap", fallback=DEFAULT_MAX_MATE_GAP)
