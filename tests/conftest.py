import pytest

from banner_studio.models.banner_models import BannerConfig, BannerCopy


@pytest.fixture
def cover_config():
    return BannerConfig(width=1200, height=628)


@pytest.fixture
def full_copy():
    return BannerCopy(
        main_text="制作時間を90%短縮",
        sub_text="AIが自動でプロ品質のバナーを生成",
        cta_text="今すぐ試す"
    )


@pytest.fixture
def short_copy():
    return BannerCopy(main_text="Save 90% of your time", cta_text="Try now")
