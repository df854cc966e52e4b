import asyncio
import pytest


class FakeOps():
    '''Stand-in for ImageOperations that records what it is asked to do.'''

    def __init__(self, size = (2732, 2732), fail_on = (), crash_on = (), batch = 0):
        self.size = size
        self.fail_on = fail_on
        self.crash_on = crash_on
        self.batch = batch
        self.events = []

    async def identify(self, path):
        await asyncio.sleep(0)
        self.events.append(('identify', path))
        return self.size

    async def crop(self, src, dst, width, height):
        from splashgen.exceptions import ImageOperationError
        started = len(self.named('crop-start'))
        self.events.append(('crop-start', src, dst, width, height))
        if self.batch:
            # Hold each crop until its whole batch has started.
            wanted = (started // self.batch + 1) * self.batch
            await asyncio.wait_for(self._started(wanted), 2)
        await asyncio.sleep(0.01)
        if any(dst.endswith(name) for name in self.fail_on):
            raise ImageOperationError(f'cannot crop {dst}')
        if any(dst.endswith(name) for name in self.crash_on):
            raise RuntimeError(f'crashed on {dst}')
        self.events.append(('crop-end', dst))

    async def draw_border(self, src, dst, width, height, border):
        await asyncio.sleep(0)
        self.events.append(('border', src, dst, width, height, border))

    def named(self, kind):
        return [e for e in self.events if e[0] == kind]

    async def _started(self, count):
        while len(self.named('crop-start')) < count:
            await asyncio.sleep(0.001)


@pytest.fixture
def project(tmp_path):
    (tmp_path / 'splash.png').write_bytes(b'png')
    (tmp_path / 'config.xml').write_text('<widget><name>App</name></widget>')
    for name in ['ios', 'android', 'windows']:
        (tmp_path / 'platforms' / name).mkdir(parents = True)
    return tmp_path


def _settings(project, **kwargs):
    from splashgen.settings import Settings
    return Settings(config_file = str(project / 'config.xml'),
                    splash_file = str(project / 'splash.png'), **kwargs)


def _target(name, specs, output_dir = '', is_present = True):
    from splashgen.catalog import Platform
    from splashgen.platforms import PlatformTarget
    return PlatformTarget(Platform(name), is_present, output_dir, tuple(specs))


def test_check_inputs(project):
    from splashgen.pipeline import check_inputs
    check_inputs(_settings(project))


def test_check_inputs_missing_source(project):
    from splashgen.exceptions import MissingSourceError
    from splashgen.pipeline import check_inputs
    (project / 'splash.png').unlink()
    with pytest.raises(MissingSourceError):
        check_inputs(_settings(project))


def test_check_inputs_missing_config(project):
    from splashgen.exceptions import ConfigParseError
    from splashgen.pipeline import check_inputs
    (project / 'config.xml').unlink()
    with pytest.raises(ConfigParseError):
        check_inputs(_settings(project))


def test_source_override(project):
    from splashgen.catalog import Platform
    from splashgen.pipeline import source_for
    settings = _settings(project)
    assert source_for(settings, Platform.ANDROID) == str(project / 'splash.png')
    (project / 'splash-android.png').write_bytes(b'png')
    assert source_for(settings, Platform.ANDROID) == str(project / 'splash-android.png')
    assert source_for(settings, Platform.IOS) == str(project / 'splash.png')


def test_generates_catalog_images(project):
    from splashgen.pipeline import run
    from splashgen.platforms import select_targets
    settings = _settings(project)
    targets = select_targets(settings, {}, 'App', str(project))
    ops = FakeOps()
    reports = run(targets, settings, ops, str(project))
    assert [r.platform.value for r in reports] == ['ios', 'android', 'windows']
    assert [len(r.results) for r in reports] == [10, 12, 8]
    assert all(not r.failures for r in reports)
    assert len(ops.named('crop-end')) == 30
    assert not ops.named('border')
    # Destination directories are created as needed.
    assert (project / 'platforms/android/res/drawable-land-hdpi').is_dir()
    assert (project / 'platforms/ios/App/Images.xcassets/LaunchImage.launchimage').is_dir()


def test_absent_platforms_skipped(project):
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run
    settings = _settings(project)
    targets = [_target('ios', [SplashSpec('a.png', 10, 10)], is_present = False),
               _target('windows', [SplashSpec('b.png', 10, 10)])]
    reports = run(targets, settings, FakeOps(), str(project))
    assert [r.platform.value for r in reports] == ['windows']


def test_nine_patch_by_name(project):
    from splashgen.catalog import SplashSpec
    from splashgen.ninepatch import BorderSpec
    from splashgen.pipeline import run
    settings = _settings(project)
    specs = [SplashSpec('res/land.9.png', 200, 100), SplashSpec('res/port.png', 100, 200)]
    ops = FakeOps(size = (100, 100))
    run([_target('android', specs)], settings, ops, str(project))
    dst = str(project / 'res' / 'land.png')
    assert ('crop-end', dst) in ops.events
    borders = ops.named('border')
    assert len(borders) == 1
    assert borders[0] == ('border', dst, str(project / 'res' / 'land.9.png'),
                          200, 100, BorderSpec(50, 150, 0, 100))


def test_nine_patch_forced(project):
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run
    settings = _settings(project, nine_patch = True)
    specs = [SplashSpec('res/land.png', 200, 100), SplashSpec('res/port.png', 100, 200)]
    ops = FakeOps()
    run([_target('android', specs)], settings, ops, str(project))
    assert sorted(e[2] for e in ops.named('border')) == [
        str(project / 'res' / 'land.9.png'), str(project / 'res' / 'port.9.png')]


def test_nine_patch_only_for_android(project):
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run
    settings = _settings(project, nine_patch = True)
    ops = FakeOps()
    run([_target('ios', [SplashSpec('a.9.png', 10, 10)])], settings, ops, str(project))
    assert not ops.named('border')


def test_failure_does_not_stop_siblings_or_platforms(project):
    from splashgen.catalog import SplashSpec
    from splashgen.exceptions import ImageOperationError
    from splashgen.pipeline import run
    settings = _settings(project)
    targets = [_target('android', [SplashSpec('bad.png', 10, 10),
                                   SplashSpec('good.png', 10, 10)]),
               _target('windows', [SplashSpec('win.png', 10, 10)])]
    ops = FakeOps(fail_on = ('bad.png',))
    reports = run(targets, settings, ops, str(project))
    android, windows = reports
    assert [r.ok for r in android.results] == [False, True]
    assert isinstance(android.failures[0].error, ImageOperationError)
    assert windows.results[0].ok


def test_invalid_dimensions_reported_per_spec(project):
    from splashgen.catalog import SplashSpec
    from splashgen.exceptions import InvalidDimensionsError
    from splashgen.pipeline import run
    settings = _settings(project)
    ops = FakeOps(size = (0, 0))
    specs = [SplashSpec('a.9.png', 10, 10), SplashSpec('b.png', 10, 10)]
    report = run([_target('android', specs)], settings, ops, str(project))[0]
    assert isinstance(report.results[0].error, InvalidDimensionsError)
    assert report.results[1].ok


def test_platforms_sequential_specs_concurrent(project):
    from os.path import basename
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run
    (project / 'out').mkdir()
    settings = _settings(project)
    targets = [_target('android', [SplashSpec(f'out/a{i}.png', 10, 10) for i in range(3)]),
               _target('windows', [SplashSpec(f'out/w{i}.png', 10, 10) for i in range(3)])]
    ops = FakeOps(batch = 3)
    reports = run(targets, settings, ops, str(project))
    assert all(not r.failures for r in reports)
    kinds = [(e[0], basename(e[1] if e[0] == 'crop-end' else e[2])[0])
             for e in ops.events if e[0] in ('crop-start', 'crop-end')]
    # All android crops start before any finishes, and windows comes after.
    assert kinds == [('crop-start', 'a')] * 3 + [('crop-end', 'a')] * 3 \
        + [('crop-start', 'w')] * 3 + [('crop-end', 'w')] * 3


def test_output_printed(project, capsys):
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run
    settings = _settings(project)
    ops = FakeOps(fail_on = ('bad.png',))
    specs = [SplashSpec('bad.png', 10, 10), SplashSpec('good.png', 10, 10)]
    run([_target('windows', specs)], settings, ops, str(project))
    out = capsys.readouterr().out
    assert 'good.png created' in out
    assert 'bad.png failed' in out


def test_unexpected_error_recorded_per_spec(project):
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run
    settings = _settings(project)
    targets = [_target('android', [SplashSpec('boom.png', 10, 10),
                                   SplashSpec('fine.png', 10, 10)]),
               _target('windows', [SplashSpec('win.png', 10, 10)])]
    ops = FakeOps(crash_on = ('boom.png',))
    android, windows = run(targets, settings, ops, str(project))
    assert isinstance(android.results[0].error, RuntimeError)
    assert android.results[1].ok
    assert windows.results[0].ok


def test_file_checks_run_in_threads(project, monkeypatch):
    from os.path import exists
    from splashgen.catalog import SplashSpec
    from splashgen.pipeline import run, source_for
    original_to_thread = asyncio.to_thread
    called = []

    async def recording_to_thread(func, *args, **kwargs):
        called.append(func)
        return await original_to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, 'to_thread', recording_to_thread)
    settings = _settings(project)
    run([_target('windows', [SplashSpec('sub/a.png', 10, 10)])], settings,
        FakeOps(), str(project))
    assert source_for in called
    assert exists in called
