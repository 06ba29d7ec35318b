"""
stands in for the blast and promiscuity filter program. Copies the input to both expected
outputs, dropping the fusions with any of the --remove gene pairs from the final output
"""
import argparse
import shutil

parser = argparse.ArgumentParser()
parser.add_argument('--fusion_preds', required=True)
parser.add_argument('--out_prefix', required=True)
parser.add_argument('--genome_lib_dir', required=True)
parser.add_argument('--max_promiscuity', type=int, required=True)
parser.add_argument('-E', dest='evalue', type=float, required=True)
parser.add_argument('--remove', nargs='*', default=[])
args = parser.parse_args()

print('mock filter', args.fusion_preds, args.max_promiscuity, args.evalue)
shutil.copyfile(args.fusion_preds, args.fusion_preds + '.post_blast_filter')
with open(args.fusion_preds, 'r') as fh, open(
    args.fusion_preds + '.post_blast_and_promiscuity_filter', 'w'
) as out_fh:
    for line in fh:
        if line.split('\t')[0] not in args.remove:
            out_fh.write(line)
