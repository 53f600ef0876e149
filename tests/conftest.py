import os

import hypothesis

hypothesis.settings.register_profile('default', max_examples=100)
hypothesis.settings.register_profile('proof', max_examples=2000)
hypothesis.settings.load_profile(os.environ.get('HYPOTHESIS_PROFILE', 'default'))
