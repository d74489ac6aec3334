from trend_story.utils.url_utils import build_image_url, build_date_url

DOMAIN = "https://trend-story-api.oopus.info"


def test_image_url_uses_second_token_as_group():
    assert build_image_url(DOMAIN, "photo_nyc_001.jpg") == f"{DOMAIN}/images/nyc/photo_nyc_001.jpg"


def test_image_url_without_underscore():
    assert build_image_url(DOMAIN, "photo.jpg") == f"{DOMAIN}/images/photo.jpg"


def test_image_url_with_trailing_underscore():
    assert build_image_url(DOMAIN, "photo_") == f"{DOMAIN}/images//photo_"


def test_image_url_without_file_name():
    assert build_image_url(DOMAIN, None) is None


def test_date_url():
    assert build_date_url(DOMAIN + "/", "20240115") == f"{DOMAIN}/date/20240115"
