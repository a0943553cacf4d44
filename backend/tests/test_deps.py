from lifetracker.api.deps import get_voice_parser


def test_voice_parser_is_built_once():
    get_voice_parser.cache_clear()

    first = get_voice_parser()

    assert get_voice_parser() is first
    assert get_voice_parser().client.session is first.client.session
