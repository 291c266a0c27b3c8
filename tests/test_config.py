from surfscore.config import _parse_dotenv


def test_parse_dotenv():
    text = '# comment\n\nSURF_LOG_LEVEL=debug\nSURF_DATA_PATH = "/tmp/x.csv"\nnot a pair\n=orphan\n'
    assert _parse_dotenv(text) == {"SURF_LOG_LEVEL": "debug", "SURF_DATA_PATH": "/tmp/x.csv"}
