identity = 'http://horology.dev/project/python/horology.time'
name = 'horology-time'
abstract = 'Calendar dates, times of day, offsets, and exact signed durations.'
icon = '⌛'
study = 'horology'

controller = 'horology'
contact = 'mailto:maintainers@horology.dev'

version_info = (0, 2, 0)
version = '.'.join(map(str, version_info))
