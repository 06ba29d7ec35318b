"""
interface to the blast and promiscuity filter which is run as a separate program
"""
import os
import shlex
import subprocess
from typing import List, Tuple, Union

from .error import ExternalFilterError
from .util import logger

POST_BLAST_SUFFIX = '.post_blast_filter'
POST_PROMISCUITY_SUFFIX = '.post_blast_and_promiscuity_filter'
LOG_SUFFIX = '.external_filter.log'


class ExternalFilter:
    """
    runs the blast and promiscuity filter on the staging file and waits for it to complete

    The program is expected to write two files next to its input: the calls remaining after
    the sequence similarity (blast) filter and the calls remaining after both the blast and
    the partner promiscuity filters. Its outputs are trusted and not re-validated
    """

    def __init__(
        self,
        command: Union[str, List[str]],
        genome_lib_dir: str,
        max_promiscuity: int = 10,
        evalue_threshold: float = 0.001,
    ):
        """
        Args:
            command: the program (and any leading arguments) to run
            genome_lib_dir: the genome library directory used by the filter
            max_promiscuity: maximum number of partners allowed for a given fusion gene
            evalue_threshold: blast e-value cutoff for partner gene sequence similarity
        """
        self.command = shlex.split(command) if isinstance(command, str) else list(command)
        self.genome_lib_dir = genome_lib_dir
        self.max_promiscuity = max_promiscuity
        self.evalue_threshold = evalue_threshold

    def build_command(self, fusion_preds: str, output_prefix: str) -> List[str]:
        return self.command + [
            '--fusion_preds',
            fusion_preds,
            '--out_prefix',
            output_prefix,
            '--genome_lib_dir',
            self.genome_lib_dir,
            '--max_promiscuity',
            str(self.max_promiscuity),
            '-E',
            str(self.evalue_threshold),
        ]

    @staticmethod
    def expected_outputs(fusion_preds: str) -> Tuple[str, str]:
        """
        Returns:
            the paths to the post blast filter and post blast and promiscuity filter files
        """
        return fusion_preds + POST_BLAST_SUFFIX, fusion_preds + POST_PROMISCUITY_SUFFIX

    def run(self, fusion_preds: str, output_prefix: str) -> Tuple[str, str]:
        """
        Args:
            fusion_preds: path to the staging file of calls to filter
            output_prefix: the prefix for all output files

        Returns:
            the paths to the post blast filter and post blast and promiscuity filter files

        Raises:
            ExternalFilterError: the program could not be run, exited with a non-zero status or did not write its outputs
        """
        command = self.build_command(fusion_preds, output_prefix)
        log_file = output_prefix + LOG_SUFFIX
        logger.info(f'running the blast and promiscuity filter: {shlex.join(command)}')
        logger.info(f'writing external filter logging to: {log_file}')
        with open(log_file, 'w') as log_fh:
            log_fh.write('>>> {}\n'.format(shlex.join(command)))
            log_fh.flush()
            try:
                subprocess.check_call(command, stdout=log_fh, stderr=log_fh)
            except subprocess.CalledProcessError as err:
                raise ExternalFilterError(
                    f'the blast and promiscuity filter exited with status {err.returncode}, see {log_file}'
                ) from err
            except OSError as err:
                raise ExternalFilterError(
                    f'could not run the blast and promiscuity filter: {self.command[0]}'
                ) from err

        outputs = self.expected_outputs(fusion_preds)
        for filename in outputs:
            if not os.path.isfile(filename):
                raise ExternalFilterError(
                    'the blast and promiscuity filter did not produce the expected output', filename
                )
        return outputs
