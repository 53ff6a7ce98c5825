from teamgraph.tools.roster_analysis import PlayerRecord


def make_records(*pairs):
    return [PlayerRecord(name=name, group=group) for name, group in pairs]
