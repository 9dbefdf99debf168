# -*- coding: utf-8 -*-
"""Excel/CSV içe aktarım: alan şeması, dosya okuyucu, satır doğrulayıcı."""
