# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "dot_loading"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

def setup_logging(config_path='config.json', log_root='runs'):
    """
    Configures the "dot_loading" logger from the run configuration.

    The logger writes to the console and to <log_root>/<run_id>/<log_file>.
    It does not propagate, so pygame and Numba chatter on the root logger
    stays out of the animation log.

    Data Contract:
    - Inputs:
        - config_path (str): JSON file with a 'run_id' string and a 'logging'
          block holding 'level', and optionally 'format' and 'log_file'
          (default 'animation.log').
        - log_root (str): directory that receives one sub-directory per run.
    - Outputs: the configured logging.Logger.
    - Side Effects: creates the run directory, replaces any handlers the
      logger already had (closing them first).
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    log_config = config['logging']
    run_dir = os.path.join(log_root, config['run_id'])
    os.makedirs(run_dir, exist_ok=True)
    log_file = os.path.join(run_dir, log_config.get('log_file', 'animation.log'))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config['level'])
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config.get('format', DEFAULT_FORMAT))
    for handler in (logging.FileHandler(log_file), logging.StreamHandler()):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized. Run ID: {config['run_id']}. Log file: {log_file}")
    return logger
