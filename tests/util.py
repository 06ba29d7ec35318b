import glob
import os

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def get_data(*paths):
    return os.path.join(DATA_DIR, *paths)


def glob_exists(*pos, strict=False, n=1):
    globexpr = os.path.join(*pos)
    file_list = glob.glob(globexpr)
    if strict and len(file_list) == n:
        return file_list[0] if len(file_list) == 1 else file_list
    elif not strict and len(file_list) > 0:
        return file_list
    else:
        print(globexpr)
        print(file_list)
        return False


def read_rows(filename):
    """
    read a tab delimited output file as a list of dicts keyed by the header
    """
    with open(filename, 'r') as fh:
        lines = [line.rstrip('\n') for line in fh]
    header = lines[0].split('\t')
    return [dict(zip(header, line.split('\t'))) for line in lines[1:]]
